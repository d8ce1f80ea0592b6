"""Dispatch: the (action, resource) table and the dotted-path tree.

Both registries are populated during setup and looked up once per
command. Neither depends on the other.
"""
