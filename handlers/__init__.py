"""
handlers/ - Presentation Layer
================================
Console handlers. Each handler prompts the user through a Console,
delegates to the appropriate Service, and prints the outcome.
No business logic lives here.
"""
