"""Sheet layout and rasterization."""
