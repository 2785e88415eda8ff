"""Main entry point for the ScriptCS runner."""
from .cli import app

if __name__ == "__main__":
    app(prog_name="scriptcs-runner")
