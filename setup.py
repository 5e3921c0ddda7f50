from setuptools import find_packages, setup

setup(
    name="qformat",
    version="1.0.0",
    description="Positional %? string formatter with type-aware value rendering",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["qformat = qformat.cli:main"]},
)
