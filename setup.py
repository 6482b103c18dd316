from setuptools import setup, find_packages

setup(
    name="camelup",       # Name on PyPI (if published)
    version="0.1.0",          # Version
    package_dir={"": "src"},  # Tell setuptools to look in src/
    packages=find_packages(where="src", include=["camelup", "camelup.*"]),
    install_requires=["rich", "termplotlib"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["camel-odds=camelup.cli:main"]},
    python_requires=">=3.10",  # Python version compatibility
)
