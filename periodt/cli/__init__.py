"""Command-line subcommands for Periodt"""
