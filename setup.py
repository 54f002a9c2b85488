from setuptools import setup, find_packages

# Use find_packages to automatically discover all packages
packages = find_packages(include=["variates", "variates.*"])

setup(
    name="variates",
    version="0.1.0",
    description="Random variate generation and densities for common probability distributions",
    packages=packages,
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "scipy",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
