"""
GitHub Contributor Synopsis

Lists everyone who opened, commented on or reacted to pull requests and
issues (and optionally committed) in a repository, an organization or every
entry of a config file.

Usage:
  github-contributors --repo name [--user owner] [--after date] [--before date] [--csv]
  github-contributors --org name [--full] [--commits] [--reactions]
  github-contributors --config contributors.json
  github-contributors --local-dir path/to/checkout
"""

import argparse
import sys

from . import api
from .config import generate_github_token, token_from_environment
from .errors import ConfigurationError
from .export import to_csv, to_json
from .remote import current_repo_info


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description='Summarize the contributors of GitHub repositories and organizations.'
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        '-r', '--repo',
        type=str,
        help='Repository name; owner comes from --user or the token owner'
    )
    target.add_argument(
        '-o', '--org',
        type=str,
        help='Organization login; every repository it owns is summarized'
    )
    target.add_argument(
        '-c', '--config',
        type=str,
        help='JSON config file listing repos and orgs'
    )
    target.add_argument(
        '-l', '--local-dir',
        type=str,
        help='Git checkout whose origin remote names the repository'
    )
    parser.add_argument(
        '-u', '--user',
        type=str,
        help='Owner of --repo (default: the login the token belongs to)'
    )
    parser.add_argument(
        '-t', '--token',
        type=str,
        help='GitHub token (default: $GITHUB_TOKEN, then `gh auth token`)'
    )
    parser.add_argument(
        '-a', '--after',
        type=str,
        help='Only count contributions at or after this timestamp (default: epoch)'
    )
    parser.add_argument(
        '-b', '--before',
        type=str,
        help='Only count contributions at or before this timestamp (default: now)'
    )
    parser.add_argument('--csv', action='store_true', help='Write CSV instead of JSON')
    parser.add_argument('--output', type=str, help='Output file (default: stdout)')
    parser.add_argument('--commits', action='store_true', help='Include commit authors')
    parser.add_argument('--reactions', action='store_true', help='Include reactors')
    parser.add_argument(
        '--full',
        action='store_true',
        help='Page through every result instead of the first 100 of each kind'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Print the raw API response without checking or summarizing it'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Report progress on stderr')
    parser.add_argument('--debug', action='store_true', help='Print queries on stderr')

    args = parser.parse_args(argv)
    if args.csv and args.config:
        parser.error('--csv cannot be combined with --config')
    if args.csv and args.dry_run:
        parser.error('--csv cannot be combined with --dry-run')
    return args


def find_token(args):
    """Token from the command line, the environment or the GitHub CLI"""
    return args.token or token_from_environment() or generate_github_token()


def run(args):
    """Fetch what the arguments ask for and return it rendered as text"""
    token = find_token(args)
    flags = dict(
        commits=args.commits,
        reactions=args.reactions,
        full=args.full,
        verbose=args.verbose,
        debug=args.debug,
        dry_run=args.dry_run,
    )

    if args.config:
        # The config file may carry its own token
        return to_json(api.from_config(token=token, file=args.config, **flags))

    if not token:
        raise ConfigurationError(
            'No token found. Pass --token, set GITHUB_TOKEN or run `gh auth login`.')

    window = dict(before=args.before, after=args.after)
    if args.org:
        result = api.org_contributors(token, args.org, **window, **flags)
    else:
        if args.local_dir:
            ref = current_repo_info(args.local_dir)
            user, repo = ref.owner, ref.repo
        else:
            user = args.user or api.current_user(token, verbose=args.verbose, debug=args.debug)
            repo = args.repo
        result = api.repo_contributors(token, user, repo, **window, **flags)

    if args.csv:
        return to_csv(result)
    return to_json(result)


def main(argv=None):
    """Main function to run the script"""
    args = parse_arguments(argv)

    try:
        output = run(args)
    except Exception as e:
        print(f"An error occurred: {e}", file=sys.stderr)
        if args.debug:
            raise
        sys.exit(1)

    if args.output:
        with open(args.output, 'w') as f:
            f.write(output)
        if args.verbose:
            print(f"Wrote contributors to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(output)
        if not output.endswith('\n'):
            sys.stdout.write('\n')


if __name__ == "__main__":
    main()
