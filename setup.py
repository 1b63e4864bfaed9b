from pathlib import Path
from setuptools import setup


# Loads _version.py module without importing the whole package.
def get_version(pkg_path):
    import os
    from importlib.util import module_from_spec, spec_from_file_location

    spec = spec_from_file_location(
        "version",
        os.path.join(pkg_path, "_version.py"),
    )
    module = module_from_spec(spec)  # type: ignore
    spec.loader.exec_module(module)  # type: ignore
    return module.__version__


version = get_version("xenosite/smarts")

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

setup(
    name="xenosite-smarts",
    version=version,
    description="Library for reading SMARTS patterns into atom and bond graphs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="S. Joshua Swamidass",
    author_email="swamidass@wustl.edu",
    packages=["xenosite.smarts"],
    entry_points={
        "console_scripts": [
            "xenosite-smarts=xenosite.smarts.__main__:app",
        ],
        "xenosite_command": ["smarts=xenosite.smarts.__main__:app"],
    },
    install_requires=["rdkit", "rich", "typer", "networkx", "pandas"],
    extras_require={"test": ["pytest", "hypothesis"]},
    classifiers=[
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "Natural Language :: English",
        "Operating System :: MacOS",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Typing :: Typed",
    ],
)
