"""Core infrastructure shared by the pricestats front ends."""
