"""Business services: credentials, tokens, validation, accounts and tasks."""
