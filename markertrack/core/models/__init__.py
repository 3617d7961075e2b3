"""Core models and schemas shared by the server and the client."""
