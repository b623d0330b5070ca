# __init__.py
# Imports all seed functions for easy batch seeding.

from .seed_demo import seed_demo
