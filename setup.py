from setuptools import setup, find_packages

setup(
    name='tu-bundle',
    version='0.1.0',
    py_modules=['tubundle', 'submitter'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'pydantic>=2.0',
        'requests>=2.28',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'tubundle = tubundle:main',
        ],
    },
)
