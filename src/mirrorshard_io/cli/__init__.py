"""Command-line interface for MirrorShard document I/O."""
