from setuptools import setup

with open("README.md", 'r') as f:
    long_description = f.read()

setup(
   name='ibkem',
   version='1.0',
   description='Identity-based key encapsulation from affine MACs and QANIZK proofs',
   license="GPL",
   long_description=long_description,
   long_description_content_type='text/markdown',
   author="ibkem developers",
   keywords="pairing identity-based-encryption kem bls12-381",
   packages=['ibkem'],  #same as name
   python_requires='>=3.7',
   install_requires=[
        'petrelic>=0.1.5',
        'blake3>=0.3',
       ], #external packages as dependencies
   extras_require={
        'bench': ['numpy'],
        'test': ['pytest'],
       },
)
