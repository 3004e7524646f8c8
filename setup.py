from setuptools import setup

setup(name='ellipticcurves',
      version='0.1',
      description='modular arithmetic and elliptic curve key pairs over prime fields',
      license='MIT',
      packages=['ellipticcurves'],
      install_requires=[
          'numpy',
          'pytictoc',
      ],
      extras_require={
          'test': ['pytest'],
      },
      entry_points={
          'console_scripts': ['ecpubkey=ellipticcurves.command_line:cmd_ecpubkey',
                              'ecpoints=ellipticcurves.command_line:cmd_ecpoints',
                              'ecisprime=ellipticcurves.command_line:cmd_ecisprime',
                              'ecmodsqrt=ellipticcurves.command_line:cmd_ecmodsqrt',
                              'ecmodinv=ellipticcurves.command_line:cmd_ecmodinv']
      },
      zip_safe=False)
