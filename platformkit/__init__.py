"""A small side-scrolling platformer framework: sprites, animations, swept-AABB collision and a headless sample level."""

__version__ = "0.1.0"