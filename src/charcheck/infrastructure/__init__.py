"""Infrastructure layer — file-backed collaborators of the validator."""
