from setuptools import find_packages, setup

setup(
    name="cueplus",
    version="0.1.0",
    description="Read, write and list CUE sheet files",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest", "pytest-mock"]},
    entry_points={"console_scripts": ["cueplus=cueplus.cli:main"]},
)
