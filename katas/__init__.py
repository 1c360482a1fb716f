"""Small, self-contained programming exercises, one module per problem."""

__version__ = "0.1.0"