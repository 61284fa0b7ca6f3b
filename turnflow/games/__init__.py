"""
Games module - Example game definitions.

Each game has its own subpackage with:
- A factory returning a GameDefinition
- Its move reducer and victory check
"""
