import os

from setuptools import setup, find_packages

with open(
    os.path.join(os.path.abspath(os.path.dirname(__file__)), "lazy_decompress", "version.py"),
    encoding="utf-8",
) as f:
    exec(f.read())

with open(
    os.path.join(os.path.abspath(os.path.dirname(__file__)), "README.md"),
    encoding="utf-8",
) as r:
    README = r.read()

test_deps = ["pytest"]
extras = {
    "test": test_deps,
}

setup(
    name="lazy-decompress",
    # pylint: disable=undefined-variable
    version=__version__,  # type: ignore
    description="Lazy Content-Encoding decompression for streamed HTTP response bodies",
    long_description=README,
    long_description_content_type="text/markdown",
    license="ISC",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Software Development :: Libraries",
    ],
    install_requires=[
        "requests",
        "ijson",
        "brotli",
        "zstandard>=0.18",
    ],
    tests_require=test_deps,
    extras_require=extras,
    include_package_data=True,
    packages=find_packages(include=["lazy_decompress"]),
    python_requires=">=3.8",
)
