"""A voxel sandbox shooter with Perlin terrain, a fly camera and projectiles."""

__version__ = "0.1.0"