"""
Domain layer: value objects, entities, collections and errors.
"""
