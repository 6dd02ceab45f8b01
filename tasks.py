"""Useful tasks for use when developing gridkit.

This uses the `Invoke` library."""
from invoke import Context, task


@task
def test(c: Context, path="gridkit", keyword=None):
    """Run the test suite"""
    cmd = f"pytest {path}"
    if keyword:
        cmd += f" -k {keyword}"
    c.run(cmd, pty=True)


@task
def translations(c: Context):
    """Make Django translations"""
    c.run("python manage.py makemessages --all --ignore venv")
    c.run("python manage.py compilemessages")
