from setuptools import setup

import queuekit

setup(
    name='queuekit',
    packages=['queuekit'],
    description='A first-in first-out queue with live iteration cursors',
    version=queuekit.__version__,
    author='George Harding',
    author_email='work.gwh@gmail.com',
    keywords=['python', 'queue', 'fifo', 'collections'],
    install_requires=[],
    extras_require={'test': ['pytest']},
    python_requires='>=3.7'
    )
