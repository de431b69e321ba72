#!/usr/bin/env python3
"""Check for banned Python constructions in ao-core source.

Banned constructions:

    Construction          Reason                            Use instead
    --------------------  --------------------------------  --------------------------
    import shlex          ao-core is the quoting authority  ao_core.core.bash
    from shlex import     for plugins, not stdlib           shell_escape / shell_join
    import subprocess     the library never runs commands;  leave execution to the
    from subprocess ...   plugins own execution             calling plugin
"""

import ast
import os
import sys

BANNED_MODULES = {
    "shlex": "use ao_core.core.bash for quoting",
    "subprocess": "library code must not execute commands",
}


def find_python_files(directory):
    """List .py files under directory in sorted order, skipping __pycache__."""
    found = []
    for root, dirs, files in os.walk(directory):
        dirs[:] = [d for d in dirs if d != "__pycache__"]
        found.extend(os.path.join(root, f) for f in files if f.endswith(".py"))
    return sorted(found)


def check_file(filepath):
    with open(filepath) as f:
        source = f.read()

    tree = ast.parse(source, filepath)
    errors = []

    for node in ast.walk(tree):
        lineno = getattr(node, "lineno", 0)

        if isinstance(node, ast.Import):
            for alias in node.names:
                if alias.name in BANNED_MODULES:
                    errors.append(
                        (lineno, f"import {alias.name}: banned, {BANNED_MODULES[alias.name]}")
                    )

        if isinstance(node, ast.ImportFrom):
            if node.module in BANNED_MODULES:
                errors.append(
                    (lineno, f"from {node.module} import: banned, {BANNED_MODULES[node.module]}")
                )

    return errors


def main():
    target = sys.argv[1] if len(sys.argv) > 1 else "src"
    if not os.path.isdir(target):
        print(f"check_style: no such directory: {target}")
        return 1

    paths = find_python_files(target)
    if not paths:
        print(f"check_style: nothing to check in {target}")
        return 1

    findings = []
    for path in paths:
        try:
            findings.extend((path, lineno, msg) for lineno, msg in check_file(path))
        except SyntaxError as e:
            print(f"check_style: cannot parse {path}: {e}")
            return 1

    if findings:
        print(f"Found {len(findings)} banned import(s):")
        for path, lineno, msg in sorted(findings):
            print(f"  {path}:{lineno}: {msg}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
