import sys

from pathlib import Path
from setuptools import setup

root_dir = Path(__file__).parent
with open(root_dir / "README.md") as f:
    readme = f.read()

extras_require = {
    "dev": ["pytest", "pytest-benchmark", "nox", "ruff", "mypy"],
}

if sys.version_info < (3, 12):
    # There is currently no atheris support for Python 3.12
    extras_require["dev"].append("atheris")

setup(
    name="base85",
    version="1.0.0",
    packages=["base85"],
    package_data={"base85": ["py.typed"]},
    install_requires=[],
    extras_require=extras_require,
    description="RFC 1924 base85 encoder and decoder",
    long_description=readme,
    long_description_content_type="text/markdown",
    license="MIT",
    keywords=[
        "base85",
        "rfc1924",
        "binary-to-text",
        "encoding",
    ],
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3 :: Only",
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Topic :: Software Development :: Libraries",
    ],
)
