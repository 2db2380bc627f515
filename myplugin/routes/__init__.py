"""Route declaration files, loaded by path rather than imported."""
