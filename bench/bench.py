#!/usr/bin/env python
from ibkem.algos import IBKEM1,IBKEM2
from ibkem.encoding import domain_size
from ibkem import utils
import time
import argparse
import logging
import numpy as np
import csv

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="run IBKEM benchmarks")
    parser.add_argument('-k',
        type=int,
        required=False,
        default=2,
        dest='k',
        help='matrix dimension k (M is 3k x k)')
    parser.add_argument('-b','--bits',
        type=int,
        required=False,
        default=128,
        dest='bits',
        help='identity length in bits')
    parser.add_argument('-l','--lam',
        type=int,
        required=False,
        default=128,
        dest='lam',
        help='QANIZK tag bits (only with --cca)')
    parser.add_argument('-i','--iters',
        type=int,
        required=False,
        default=10,
        dest='iters',
        help='number of identities to extract, encrypt to and decrypt for')
    parser.add_argument('-c','--cca',
        action='store_true',
        required=False,
        default=False,
        dest='cca',
        help='benchmark IBKEM2 (QANIZK-bound ciphertexts) instead of IBKEM1')
    parser.add_argument('-v','--verbose',
        action='store_true',
        required=False,
        default=False,
        dest='verbose',
        help='log debug output of the library')
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    l = domain_size(args.bits)
    if args.cca:
        ibkem = IBKEM2(args.k, l, 0, lam=args.lam)
    else:
        ibkem = IBKEM1(args.k, l, 0)

    ## Setup ###
    setup_time = time.time()
    pk, sk = ibkem.setup()
    setup_time = time.time()-setup_time
    print("Setup (s):\t", setup_time)
    print("--------------------------")

    prefix = 'bench{}_k{}_b{}_'.format('cca' if args.cca else 'cpa', args.k, args.bits)
    f_ops = open(prefix+'ops.csv', 'w')
    writer = csv.writer(f_ops)
    writer.writerow(['Extract', 'Enc', 'Dec'])
    times = {
        "Extract": [],
        "Enc": [],
        "Dec": [],
    }

    for i in range(args.iters):
        email, identity = utils.generate_email_and_identity(args.bits)

        extract_time = time.time()
        usk = ibkem.extract(sk, identity)
        extract_time = time.time()-extract_time

        enc_time = time.time()
        ct, key = ibkem.encrypt(pk, identity)
        enc_time = time.time()-enc_time

        dec_time = time.time()
        if args.cca:
            key_prime = ibkem.decrypt(pk, usk, identity, ct)
        else:
            key_prime = ibkem.decrypt(usk, ct)
        dec_time = time.time()-dec_time

        # ensure correctness
        assert(key == key_prime)

        writer.writerow([extract_time, enc_time, dec_time])
        times["Extract"].append(extract_time)
        times["Enc"].append(enc_time)
        times["Dec"].append(dec_time)
        print(i if i>0 and i%10==0 else ".", end="", flush=True)

    f_ops.close()

    print("\n\nAverage Times (s)")
    print("--------------------------")
    for key in times.keys():
        print("{}:\t{:.6f}\t(std {:.6f}, avg of {})".format(key,np.mean(times[key]),np.std(times[key]),args.iters))

    # a ciphertext for another identity must not decrypt to the same key
    _, other = utils.generate_email_and_identity(args.bits)
    other_usk = ibkem.extract(sk, other)
    if args.cca:
        print("\nWrong identity decrypts to:\t", ibkem.decrypt(pk, other_usk, other, ct))
    else:
        print("\nWrong identity gives correct key:\t", ibkem.decrypt(other_usk, ct) == key)
