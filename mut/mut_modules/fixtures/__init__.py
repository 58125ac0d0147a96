"""Example fixtures driven by ChainRunner."""
