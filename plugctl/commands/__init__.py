"""plugctl subcommands."""
