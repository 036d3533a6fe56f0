"""Single-line .env checks and the runner that applies them to a file's lines."""