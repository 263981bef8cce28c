#!/usr/bin/env python
import time
import numpy as np
from petrelic.multiplicative.pairing import G1,G2,GT,G1Element,G2Element
from ibkem.groups import GroupContext,random_matrix,random_vector
from ibkem.utils import serialize_points,hash_to_bits
from ibkem import linalg

if __name__ == "__main__":
    group = GroupContext()
    k = 2

    # random inputs of the shapes used by the schemes
    scalar = G1.order().random()
    m = random_matrix(3*k, k)
    m_g1 = group.matrix_lift_g1(m)
    r = random_vector(k)
    c0 = linalg.group_matrix_vector_mul(m_g1, r, G1)
    w = group.vector_lift_g2(random_vector(3*k))

    timings = {
        "lift in G1": [],
        "lift in G2": [],
        "lift in GT": [],
        "pairing": [],
        "multi-pairing (3k pairs)": [],
        "[M]_1 * r (wprod)": [],
        "[M]_1 * r (naive)": [],
        "serialize c0": [],
        "hash to 128 bits": [],
    }

    iters = 100
    print("averaging over {} iterations".format(iters), end="", flush=True)
    for i in range(iters):
        start = time.time()
        group.lift_g1(scalar)
        timings["lift in G1"].append(time.time()-start)

        start = time.time()
        group.lift_g2(scalar)
        timings["lift in G2"].append(time.time()-start)

        start = time.time()
        group.lift_gt(scalar)
        timings["lift in GT"].append(time.time()-start)

        start = time.time()
        group.pairing(c0[0], w[0])
        timings["pairing"].append(time.time()-start)

        start = time.time()
        group.multi_pairing(zip(c0, w))
        timings["multi-pairing (3k pairs)"].append(time.time()-start)

        start = time.time()
        linalg.group_matrix_vector_mul(m_g1, r, G1)
        timings["[M]_1 * r (wprod)"].append(time.time()-start)

        start = time.time()
        naive = []
        for row in m_g1:
            acc = G1.neutral_element()
            for g, s in zip(row, r):
                acc = acc * (g ** s)
            naive.append(acc)
        timings["[M]_1 * r (naive)"].append(time.time()-start)

        start = time.time()
        encoded = serialize_points(c0)
        timings["serialize c0"].append(time.time()-start)

        start = time.time()
        hash_to_bits(encoded, 128)
        timings["hash to 128 bits"].append(time.time()-start)

        print(i if i>0 and i%10==0 else ".", end="", flush=True)

    print("\n")
    for key in timings.keys():
        print("{}\t{}".format(key, np.mean(timings[key])))

    # sizes
    print()
    print("G1 bytes:\t{}".format(len(G1Element.to_binary(c0[0]))))
    print("G2 bytes:\t{}".format(len(G2Element.to_binary(w[0]))))
    print("c0 bytes:\t{}".format(len(encoded)))
