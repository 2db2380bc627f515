"""Support helpers shared by the plugin and its templates."""
