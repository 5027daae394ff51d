"""
Utils module - game registry, play configuration, and state factory.
"""
