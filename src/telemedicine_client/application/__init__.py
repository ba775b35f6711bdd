"""
Application layer: provider contract, collaborator ports and the read-through cache.
"""
