"""Popo command line interface."""
