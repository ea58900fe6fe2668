"""
Blog database configuration.
Stores posts; comments live nested inside their post document.
"""


class Collections:
    """Collection names in the blog database."""
    POSTS = "posts"
