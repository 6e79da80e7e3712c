from setuptools import setup, find_packages

setup(
    name="lazycell",
    version="0.1",
    description="lazycell is a demand-driven incremental computation engine. Root cells hold values that can be changed, memo cells cache the results of functions of other cells, and changes invalidate exactly the cached results that depend on them. All data cells of a graph can be captured and restored as a single snapshot.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
)
