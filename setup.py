from setuptools import setup, find_packages

setup(
    name="rowspace",
    version="0.1.0",
    description="Vectors, dense and sparse matrices, exact fractions and permutations for elimination-style algorithms",
    long_description=("Small linear-algebra and exact-arithmetic toolkit: a shared matrix contract over dense and "
                      "sparse backings with the elementary row operations, canonical exact fractions, fixed-dimension "
                      "vectors, and transposition-based permutations for tracking row reorderings."),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["rowspace", "rowspace.*"]),
    install_requires=["numpy", "scipy", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "matrix", "sparse", "rational", "gaussian elimination"],
    zip_safe=False,
)
