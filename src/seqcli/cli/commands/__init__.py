"""seqcli subcommands."""
