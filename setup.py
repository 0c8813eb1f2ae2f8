from setuptools import setup

setup(
    name='ember-interpreter',
    version='0.1.0',
    description='Ember language tree-walking interpreter',
    author='Ember contributors',
    package_dir={'': 'src'},
    packages=['ember', 'ember.parser', 'ember.evaluator', 'ember.cli'],
    python_requires='>=3.11',
    install_requires=[
        'click>=7.0',
        'rich>=10.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'ember = ember.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
