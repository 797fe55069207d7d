import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="rootsolve",
    version="0.1.0",
    description="Bisection, Newton and robust two stage root finding for "
                "scalar functions.",
    install_requires=[
        'numpy', 'scipy'
    ],
    extras_require={
        'test': ['pytest'],
    },
    keywords='root finding bisection newton numerical methods',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['rootsolve', 'rootsolve.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
