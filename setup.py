from setuptools import setup

setup(
    name='atmfjstc-c-codegen',
    version='1.0.0',

    author_email='atmfjstc@protonmail.com',

    package_dir={'': 'src'},
    packages=['atmfjstc.lib.c_codegen', 'atmfjstc.lib.c_codegen.ast'],

    install_requires=[
        'atmfjstc-py-lang-utils>=1.3, <2',
        'atmfjstc-ast>=1.1, <2',
        'atmfjstc-text-utils>=1.3, <2',
    ],

    zip_safe=True,

    description="Renders trees of C code structures in configurable house styles (braces, indents, casing)",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Code Generators"
    ],
    python_requires='>=3.7',
)
