"""es5guard — verify that compiled JavaScript contains no post-ES5 syntax."""

__version__ = "0.1.0"
