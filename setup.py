import os
import re
from codecs import open

from setuptools import find_packages
from setuptools import setup

# Based on https://github.com/pypa/sampleproject/blob/main/setup.py
# and https://python-packaging-user-guide.readthedocs.org/

here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()
long_description_content_type = "text/markdown"

with open(os.path.join(here, "pngchunk/version.py")) as f:
    match = re.search(r'VERSION = "(.+?)"', f.read())
    assert match
    VERSION = match.group(1)

setup(
    name="pngchunk",
    version=VERSION,
    description="A PNG chunk codec for hiding, reading and removing messages in PNG files.",
    long_description=long_description,
    long_description_content_type=long_description_content_type,
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Development Status :: 5 - Production/Stable",
        "Environment :: Console",
        "Operating System :: MacOS",
        "Operating System :: POSIX",
        "Operating System :: Microsoft :: Windows",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Security",
        "Typing :: Typed",
    ],
    packages=find_packages(
        include=[
            "pngchunk",
            "pngchunk.*",
        ]
    ),
    include_package_data=True,
    package_data={"pngchunk": ["py.typed"]},
    entry_points={
        "console_scripts": [
            "pngchunk = pngchunk.tools.main:pngchunk",
        ],
    },
    python_requires=">=3.11",
    # https://packaging.python.org/en/latest/discussions/install-requires-vs-requirements/#install-requires
    # It is not considered best practice to use install_requires to pin dependencies to specific versions.
    install_requires=[
        "ruamel.yaml>=0.16,<0.19",
    ],
    extras_require={
        "dev": [
            "hypothesis>=5.8,<7",
            "pytest-cov>=2.7.1,<6",
            "pytest>=6.1.0,<9",
        ],
    },
)
