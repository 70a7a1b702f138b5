import setuptools

with open('README.md', 'rt') as f:
    long_description = f.read()

setuptools.setup(
    name='bvint',
    version='0.1.0',
    description='arbitrary-width unsigned integers on explicit bit vectors, with a Booth multiplier',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT',
    python_requires='>=3.8',
    install_requires=['numpy>=1.23.0', 'gmpy2>=2.1.2'],
    extras_require={
        'test': ['pytest>=7'],
    },
    packages=['bvint', 'bvint.core', 'bvint.arithmetic'],
    entry_points={
        'console_scripts': ['bvint-demo = bvint.demo:main'],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Operating System :: POSIX :: Linux',
        'License :: OSI Approved :: MIT License',
    ],
)
