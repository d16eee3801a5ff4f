"""Template bodies for every document written by :mod:`ccinit.scaffold`.

Each constant is rendered with :class:`ccinit.template.TemplateRenderer` using
the variables returned by :meth:`ccinit.config.ProjectConfig.context`.
"""

from __future__ import annotations

__all__ = [
    "BUG_REPORT_TEMPLATE",
    "CI_WORKFLOW_TEMPLATE",
    "CLAUDE_DIR_README_TEMPLATE",
    "CLAUDE_MD_TEMPLATE",
    "CONTRIBUTING_TEMPLATE",
    "FEATURE_REQUEST_TEMPLATE",
    "GITIGNORE_TEMPLATE",
    "LICENSE_TEMPLATE",
    "MAKEFILE_TEMPLATE",
    "PRE_COMMIT_TEMPLATE",
    "PULL_REQUEST_TEMPLATE",
]


CLAUDE_MD_TEMPLATE = """# {{ name }}

{{ description }}

This project has been optimized for Claude Code development.

## Quick Commands

```bash
# Development
make dev          # Start development environment
make test         # Run all tests
make lint         # Run linting and formatting
make build        # Build the project

# Claude Code Integration
claude            # Start Claude Code interactive session
claude -p "help"  # Quick help
claude -c         # Continue last session
```

## Project Structure

- `.claude/` - Claude Code configuration
- `.github/workflows/` - CI/CD pipelines
- `Makefile` - Development commands
- `.pre-commit-config.yaml` - Code quality hooks

## Development Workflow

1. Use `make install` to install dependencies
2. Use `make dev` to start development
3. Run `make test` before committing
4. Use `claude` for AI assistance
5. Commit with conventional commit messages

## Claude Code Features

This project includes:
- Pre-configured project memory (this file)
- Integration with development tools via Makefile
- GitHub workflows and templates
- Pre-commit hooks for code quality
- Claude Code configuration in `.claude/` directory

## Getting Started

1. Install dependencies: `make install`
2. Start development: `make dev`
3. Run tests: `make test`
4. Open Claude Code: `claude`

## Useful Claude Code Commands

- `claude -p "explain the project structure"` - Get project overview
- `claude -p "help with testing"` - Get testing assistance
- `claude -p "review my changes"` - Code review help
- `claude --dry-run` - Preview actions without making changes

For more information, see the `.claude/README.md` file for Claude Code configuration options.

---
*Generated by ccinit on {{ date }}*
"""

CLAUDE_DIR_README_TEMPLATE = """# .claude Directory

This directory contains Claude Code configuration and project-specific settings.

## What goes here?

- Custom Claude Code configurations
- Project-specific prompts and workflows
- Local Claude Code settings (not committed to git)
- Integration configurations for MCP servers

## Getting Started

This directory is automatically created by the ccinit tool. You can customize it
based on your project's specific needs.
"""

GITIGNORE_TEMPLATE = """# Claude Code
.claude/local/
*.claude-session

# Common
.env
.env.local
*.log
.DS_Store
.vscode/
.idea/

# Dependencies
node_modules/
venv/
__pycache__/
*.pyc

# Build artifacts
dist/
build/
*.egg-info/
target/

# Test coverage
.coverage
htmlcov/
.pytest_cache/

# OS specific
Thumbs.db

# Add project-specific ignores below this line
"""

MAKEFILE_TEMPLATE = """# Makefile for {{ name }}
# Generated by ccinit - Claude Code optimization tool

.PHONY: help install dev test lint build clean

help:
\t@echo "Available commands:"
\t@echo "  make install   - Install dependencies"
\t@echo "  make dev       - Start development environment"
\t@echo "  make test      - Run tests"
\t@echo "  make lint      - Run linting and formatting"
\t@echo "  make build     - Build the project"
\t@echo "  make clean     - Clean build artifacts"

install:
\t@echo "Installing dependencies..."
\t@echo "Add your dependency installation commands here"

dev:
\t@echo "Starting development environment..."
\t@echo "Add your development startup commands here"

test:
\t@echo "Running tests..."
\t@echo "Add your test commands here"

lint:
\t@echo "Running linting and formatting..."
\t@echo "Add your linting commands here"

build:
\t@echo "Building project..."
\t@echo "Add your build commands here"

clean:
\t@echo "Cleaning build artifacts..."
\trm -rf dist/ build/ *.egg-info/ target/
\tfind . -type d -name __pycache__ -exec rm -rf {} + 2>/dev/null || true
\tfind . -type f -name "*.pyc" -delete 2>/dev/null || true
"""

PRE_COMMIT_TEMPLATE = """# Pre-commit configuration for {{ name }}
# Install with: pre-commit install

repos:
  - repo: https://github.com/pre-commit/pre-commit-hooks
    rev: v4.4.0
    hooks:
      - id: trailing-whitespace
      - id: end-of-file-fixer
      - id: check-yaml
      - id: check-added-large-files
      - id: check-merge-conflict

  - repo: local
    hooks:
      - id: test
        name: run tests
        entry: make test
        language: system
        pass_filenames: false

      - id: lint
        name: run linting
        entry: make lint
        language: system
        pass_filenames: false

# Add project-specific pre-commit hooks below this line
"""

CI_WORKFLOW_TEMPLATE = """name: CI

# Continuous integration for {{ name }}
on:
  push:
    branches: [main]
  pull_request:
    branches: [main]

jobs:
  test:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v4

      - name: Run tests
        run: make test

      - name: Run linting
        run: make lint

      - name: Build project
        run: make build
"""

BUG_REPORT_TEMPLATE = """---
name: Bug report
about: Create a report to help us improve
title: ''
labels: bug
assignees: {{ github_username }}

---

**Describe the bug**
A clear and concise description of what the bug is.

**To Reproduce**
Steps to reproduce the behavior:
1. Go to '...'
2. Click on '....'
3. Scroll down to '....'
4. See error

**Expected behavior**
A clear and concise description of what you expected to happen.

**Screenshots**
If applicable, add screenshots to help explain your problem.

**Environment (please complete the following information):**
 - OS: [e.g. iOS]
 - Version [e.g. 22]

**Additional context**
Add any other context about the problem here.
"""

FEATURE_REQUEST_TEMPLATE = """---
name: Feature request
about: Suggest an idea for this project
title: ''
labels: enhancement
assignees: {{ github_username }}

---

**Is your feature request related to a problem? Please describe.**
A clear and concise description of what the problem is. Ex. I'm always frustrated when [...]

**Describe the solution you'd like**
A clear and concise description of what you want to happen.

**Describe alternatives you've considered**
A clear and concise description of any alternative solutions or features you've considered.

**Additional context**
Add any other context or screenshots about the feature request here.
"""

PULL_REQUEST_TEMPLATE = """## Description

Please include a summary of the changes and the related issue. Please also include relevant motivation and context.

Fixes # (issue)

## Type of change

Please delete options that are not relevant.

- [ ] Bug fix (non-breaking change which fixes an issue)
- [ ] New feature (non-breaking change which adds functionality)
- [ ] Breaking change (fix or feature that would cause existing functionality to not work as expected)
- [ ] This change requires a documentation update

## How Has This Been Tested?

Please describe the tests that you ran to verify your changes. Provide instructions so we can reproduce.

- [ ] Test A
- [ ] Test B

## Checklist:

- [ ] My code follows the style guidelines of this project
- [ ] I have performed a self-review of my code
- [ ] I have commented my code, particularly in hard-to-understand areas
- [ ] I have made corresponding changes to the documentation
- [ ] My changes generate no new warnings
- [ ] I have added tests that prove my fix is effective or that my feature works
- [ ] New and existing unit tests pass locally with my changes
- [ ] Any dependent changes have been merged and published
"""

CONTRIBUTING_TEMPLATE = """# Contributing to {{ name }}

First off, thank you for considering contributing to {{ name }}! It's people like you that make {{ name }} such a great tool.

## Where do I go from here?

If you've noticed a bug or have a feature request, make sure to check our [Issues](https://github.com/{{ github_username }}/{{ name }}/issues) if there's something similar to what you have in mind. If there isn't, feel free to open a new issue!

## Fork & create a branch

If this is something you think you can fix, then fork {{ name }} and create a branch with a descriptive name.

A good branch name would be:

```
git checkout -b 325-add-japanese-translations
```

## Get the test suite running

Make sure you're using a recent version of the development tools:

```bash
make install
make test
```

## Implement your fix or feature

At this point, you're ready to make your changes! Feel free to ask for help; everyone is a beginner at first.

## View your changes

Make sure to take a look at your changes in a real environment.

## Get the style right

Your patch should follow the same conventions & pass the same code quality checks as the rest of the project.

```bash
make lint
```

## Make a Pull Request

At this point, you should switch back to your main branch and make sure it's up to date with the latest {{ name }} main branch:

```bash
git remote add upstream git@github.com:{{ github_username }}/{{ name }}.git
git checkout main
git pull upstream main
```

Then update your feature branch from your local copy of main, and push it!

```bash
git checkout 325-add-japanese-translations
git rebase main
git push --set-upstream origin 325-add-japanese-translations
```

Finally, go to GitHub and make a Pull Request!

## Keeping your Pull Request updated

If a maintainer asks you to "rebase" your PR, they're saying that a lot of code has changed, and that you need to update your branch so it's easier to merge.

## Merging a PR (maintainers only)

A PR can only be merged into main by a maintainer if:

* It is passing CI.
* It has been approved by at least two maintainers. If it was a maintainer who opened the PR, only one extra approval is needed.
* It has no requested changes.
* It is up to date with current main.

Any maintainer is allowed to merge a PR if all of these conditions are met.
"""

LICENSE_TEMPLATE = """MIT License

Copyright (c) {{ year }} {{ github_username }}

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""
