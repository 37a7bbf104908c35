from setuptools import setup, find_packages
import os
import sys

def create_git_hook():
    """
    Create a pre-commit git hook to run tests before committing code.
    """
    git_hooks_dir = os.path.join(os.getcwd(), '.git', 'hooks')
    pre_commit_path = os.path.join(git_hooks_dir, 'pre-commit')

    # Check if .git directory exists
    if not os.path.exists(git_hooks_dir):
        print("Not a git repository. Skipping git hook installation.")
        return

    # Get the path of the Python interpreter used for pip installation
    python_executable = sys.executable

    hook_content = f"""#!/bin/bash
"{python_executable}" run_tests.py
if [ $? -ne 0 ]; then
  echo "Tests failed. Aborting commit."
  exit 1
fi
"""

    # Write the pre-commit hook
    with open(pre_commit_path, 'w') as hook_file:
        hook_file.write(hook_content)

    # Make the hook executable
    os.chmod(pre_commit_path, 0o775)
    print("Pre-commit hook created at .git/hooks/pre-commit")

create_git_hook()

setup(
    name="siUnits",
    version="1.0.0",
    packages=find_packages(include=['siUnits', 'siUnits.*']),
    include_package_data=True,
    description="Localized unit abbreviation parsing and formatting",
    tests_require=['pytest'],
    package_data={},
    install_requires=[
        'rich',
        'pyyaml',
        'tabulate',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
