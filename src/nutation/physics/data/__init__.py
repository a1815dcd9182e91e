"""Static data files shipped with the physics package."""
