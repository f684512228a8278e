"""Plain-text exports of the Frontend Playbook for language models."""
