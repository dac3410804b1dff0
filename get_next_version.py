# filename: get_next_version.py

import argparse
import os
import subprocess
import sys
from dataclasses import replace

from nexttag import Config, ParseFailure, TagError, next_tag, parse
from nexttag.compute import strip_prefix
from nexttag.parser import is_null_string


def env_input(name):
    value = os.environ.get(f"INPUT_{name}", "")
    return None if value == "" else value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Compute the next release tag")
    parser.add_argument("--scheme", "--version-scheme", dest="scheme",
                        default=env_input("VERSION_SCHEME") or "semantic",
                        help="continuous or semantic")
    parser.add_argument("--tag", default=env_input("TAG"),
                        help="previous tag, looked up with git when omitted")
    parser.add_argument("--version-type", default=env_input("VERSION_TYPE") or "prerelease")
    parser.add_argument("--prefix", default=env_input("PREFIX"))
    parser.add_argument("--suffix", default=env_input("SUFFIX"))
    parser.add_argument("--repo", default=".", help="path of the git checkout")
    return parser.parse_args(argv)


def list_tags(repo, prefix=None):
    command = ["git", "-C", repo, "tag", "--list"]
    if prefix:
        command.append(f"{prefix}-*")
    result = subprocess.run(command, capture_output=True, text=True, check=True)
    return [tag for tag in result.stdout.strip().split("\n") if tag]


def latest_tag(tags, prefix=None):
    """Highest tag by semantic version precedence, ignoring tags without a version."""
    versions = []
    for tag in tags:
        try:
            version = parse(strip_prefix(tag, prefix))
        except ParseFailure:
            continue
        versions.append((version.to_semver(), tag))

    if not versions:
        return None
    return max(versions, key=lambda item: item[0])[1]


def last_tag(tag, repo, prefix=None):
    if not is_null_string(tag):
        return tag
    return latest_tag(list_tags(repo, prefix), prefix)


def write_outputs(previous, computed):
    path = os.environ.get("GITHUB_OUTPUT")
    if not path:
        return
    with open(path, "a") as fh:
        fh.write(f"previous_tag={previous or ''}\n")
        fh.write(f"next_tag={computed}\n")


def main(argv=None):
    args = parse_args(argv)
    try:
        config = Config(
            scheme=args.scheme,
            version_type=args.version_type,
            prefix=args.prefix,
            suffix=args.suffix,
        )
        previous = last_tag(args.tag, args.repo, args.prefix)
        print(f"Computing the next tag based on: {previous}", file=sys.stderr)

        computed = next_tag(replace(config, tag=previous))
    except TagError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except subprocess.CalledProcessError as e:
        print(f"Error: git failed: {e.stderr.strip() or e}", file=sys.stderr)
        return 1

    print(f"Computed the next tag as: {computed}", file=sys.stderr)
    write_outputs(previous, computed)
    print(computed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
