"""Writer for MagicaVoxel .vox files: chunk encoding, a voxel scene writer and sample scenes."""

__version__ = "0.1.9"

__all__ = ["chunks", "writer", "samples"]