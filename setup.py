import setuptools
import sys
import os
import re


if sys.version_info < (3, 10):
    sys.exit('Sorry, Python < 3.10 is not supported')

with open("README.md", "r") as fh:
    long_description = fh.read()

# Read metadata from metadata file
metadata_file = open(os.path.join(os.path.dirname(__file__), 'amlpublish', '_metadata.py')).read()
metadata = dict(re.findall("__([a-z]+)__ = '([^']+)'", metadata_file))


def read_requirements_links(fi: str):
    _e = "-e "

    def proc_req(r):
        r = r.strip()
        if len(r) == 0 or any(map(lambda x: r.startswith(x), ["#", "."])):
            return None
        if r.startswith(_e):
            r = r[r.rindex("=") + 1 :]
        return r

    def proc_link(r):
        r = r.strip()
        if len(r) == 0 or not r.startswith(_e):
            return None
        return r[len(_e) :]

    with open(fi, "rt") as rt:
        lines = rt.read().splitlines()
        reqs = list(filter(None, map(proc_req, lines)))
        links = list(filter(None, map(proc_link, lines)))
    return reqs, links


requires, links = read_requirements_links("requirements.txt")

setuptools.setup(
    name="amlpublish",
    version=metadata['version'],
    description="Publish Python functions as Azure Machine Learning web services",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=requires,
    dependency_links=links,
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["amlpublish=amlpublish.cli.bin:entry_point"],
    },
    python_requires=">=3.10",
)
