# sitepull/cli/commands/__init__.py
