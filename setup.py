from setuptools import setup, find_namespace_packages

setup(
    name="dense_grid",
    version="0.1.0",
    packages=find_namespace_packages(include=["dense_grid", "dense_grid.*"], exclude=["dense_grid.tests*"]),
    package_data={"dense_grid.configs": ["*.yaml"]},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
