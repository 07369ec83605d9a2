from setuptools import setup, find_packages

setup(
    name='inputid',
    version='0.1.0',
    description='Deterministic, collision-free ids for HTML form controls',
    packages=find_packages(exclude=('tests', 'tests.*')),
    python_requires='>=3.10',
    install_requires=[
        'PyYAML',
        'python-dotenv',
        'beautifulsoup4',
        'lxml',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'inputid = inputid.main:main',
        ],
    },
)
