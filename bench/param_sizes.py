#!/usr/bin/env python

"""Report sizes of keys, ciphertexts, proofs and CRS for several parameter sets.

Outputs:
- sizes of elements of G1, G2, GT, and a scalar
- public key, user key and ciphertext sizes for IBKEM1 and IBKEM2
"""

from petrelic.multiplicative.pairing import G1,G2,GT,G1Element,G2Element,GTElement
from ibkem.algos import IBKEM1,IBKEM2
from ibkem.encoding import domain_size
from ibkem.utils import hash_identity
import argparse

def print_element_sizes():
    print("G1 element size:\t",len(G1Element.to_binary(G1.generator()**G1.order().random())))
    print("G2 element size:\t",len(G2Element.to_binary(G2.generator()**G2.order().random())))
    print("GT element size:\t",len(GTElement.to_binary(GT.generator()**GT.order().random())))
    print("Scalar size:\t",len(G1.order().random().binary()))

def print_scheme_sizes(k, bits, lam=None):
    l = domain_size(bits)
    if lam is None:
        ibkem = IBKEM1(k, l, 0)
        name = "IBKEM1"
    else:
        ibkem = IBKEM2(k, l, 0, lam=lam)
        name = "IBKEM2"
    pk, sk = ibkem.setup()
    identity = hash_identity(b"size@example.org", bits)
    usk = ibkem.extract(sk, identity)
    ct, _ = ibkem.encrypt(pk, identity)

    print("{} pk size:\t".format(name), pk.get_size())
    if lam is not None:
        print("{} crs size:\t".format(name), pk.crs.get_size())
        print("{} proof size:\t".format(name), ct.proof.get_size())
    print("{} usk size:\t".format(name), usk.get_size())
    print("{} ct size:\t".format(name), ct.get_size())

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="print parameter sizes")
    parser.add_argument('-k',
        type=int,
        required=False,
        default=2,
        dest='k',
        help='matrix dimension k')
    parser.add_argument('-l','--lam',
        type=int,
        required=False,
        default=128,
        dest='lam',
        help='QANIZK tag bits')
    args = parser.parse_args()

    print_element_sizes()

    for bits in [32, 64, 128]:
        print("\nidentity bits = {}".format(bits))
        print_scheme_sizes(args.k, bits)
        print_scheme_sizes(args.k, bits, lam=args.lam)
