"""Command-line subcommands for centroplot"""
