"""Constant tables shared across class2css modules."""
