import os
import re
import subprocess


# Rewritten from the latest git tag when building from a checkout
version = "0.1.0"


def describe(repodir):
    """Return the PEP 440 version of a seqiter checkout, None outside git.

    Tags are expected as `vX.Y.Z`, commits after a tag give a post release
    with the abbreviated commit hash as local label.
    """
    try:
        description = subprocess.check_output(
            ["git", "describe", "--tags"],
            stderr=subprocess.STDOUT, cwd=repodir,
            universal_newlines=True).strip()
    except (OSError, subprocess.CalledProcessError):
        return None

    match = re.fullmatch(r"v([^-]+)(?:-(\d+)-(g[0-9a-f]+))?", description)
    if match is None:
        raise RuntimeError("unexpected tag format: " + description)

    tag, distance, commit = match.groups()
    if distance is None:
        return tag
    return "{}.post{}+{}".format(tag, distance, commit)


_described = describe(os.path.dirname(os.path.abspath(__file__)))
if _described is not None and _described != version:
    version = _described
    with open(__file__) as f:
        source = f.read()
    with open(__file__, "w") as f:
        f.write(re.sub(r"version = \".*\"\n",
                       "version = \"{}\"\n".format(version),
                       source, count=1))
