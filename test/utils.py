from __future__ import annotations

from os import makedirs
from os.path import dirname, join
from subprocess import CalledProcessError

from utz import cd, proc

ROOT = dirname(dirname(__file__))
REMOTE = 'git@github.com:alice/proj.git'


class FakeGit:
    """Stand-in for ``ghlink.repo.Git``; values that are exceptions are raised instead of returned."""
    def __init__(self, remote_url=REMOTE, revision='abc123', prefix=''):
        self.values = dict(remote_url=remote_url, revision=revision, prefix=prefix)
        self.calls = []

    def _get(self, name, cwd):
        self.calls.append((name, cwd))
        value = self.values[name]
        if isinstance(value, Exception):
            raise value
        return value

    def remote_url(self, cwd):
        return self._get('remote_url', cwd)

    def revision(self, cwd):
        return self._get('revision', cwd)

    def prefix(self, cwd):
        return self._get('prefix', cwd)


def failed(*cmd):
    return CalledProcessError(128, list(cmd))


def write(path, text):
    with open(path, 'w') as f:
        f.write(text)


def git(*args):
    proc.run('git', '-c', 'user.name=test', '-c', 'user.email=test@example.com', '-c', 'commit.gpgsign=false', *args, log=None)


def make_repo(cwd, files, remote=REMOTE):
    """Create a git repo in ``cwd`` containing ``files`` (relative path → text), committed once."""
    with cd(cwd):
        git('init', '-q')
        git('remote', 'add', 'origin', remote)
        for path, text in files.items():
            parent = dirname(path)
            if parent:
                makedirs(parent, exist_ok=True)
            write(path, text)
        git('add', '.')
        git('commit', '-q', '-m', 'init')
        return proc.text('git', 'rev-parse', 'HEAD', log=None).strip()


def data_path(tmpdir, name, text):
    path = join(tmpdir, name)
    write(path, text)
    return path
