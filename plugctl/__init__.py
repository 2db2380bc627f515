"""
plugctl - operator CLI for the plugin lifecycle.

Runs activation, deactivation and uninstall against a host database.
"""
