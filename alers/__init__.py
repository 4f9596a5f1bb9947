"""Building blocks for small game engines: meshes, SDFs, textures, resource stores, input, UI layout and an entity world."""

__version__ = "0.1.0"