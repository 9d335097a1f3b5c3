# This file lists files which should be ignored by pytest
collect_ignore = ["setup.py"]

pytest_plugins = ['trigger_registry.tests.pytest_plugin']
