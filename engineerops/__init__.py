"""In-memory GitHub, Jira and Slack stand-ins, markdown chunking, an embedding client and configuration loading."""

__version__ = "0.1.0"