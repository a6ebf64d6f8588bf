from setuptools import setup


setup(
    name='geogen',
    version='0.1.0',
    description='Symbolic-numeric equivalence of geometric objects.',
    py_modules=[
        'analyze',
        'arguments',
        'constructions',
        'geometry',
        'geometry_holder',
        'layouts',
        'objects_constructor',
        'objects_container',
        'parsing',
        'profiling',
        'sketch',
        'theorems',
    ],
    install_requires=[
        'numpy',
        'absl-py',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['geogen-analyze = analyze:run'],
    },
    python_requires='>=3.6',
)
