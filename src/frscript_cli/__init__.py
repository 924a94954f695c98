"""Command-line interface for the Frscript static analyzer"""
