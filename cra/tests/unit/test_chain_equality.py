# cra/tests/unit/test_chain_equality.py
'''
Test Suite para ChainEquality:
    Verifica que la igualdad estructural sea una relación de equivalencia
    y que cadenas iguales compartan altura.
'''

import sys
import os
import itertools

import pytest

# Ajuste de ruta para ejecución directa
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.abspath(os.path.join(current_dir, '../../..'))
if root_dir not in sys.path:
    sys.path.append(root_dir)

from cra.core.builders.chain_builder import ChainBuilder
from cra.core.models.chain import Chain
from cra.core.models.equality_proof import EqualityProof
from cra.core.services.chain_equality import ChainEquality

def all_chains(max_height: int = 3, ids=(1, 2)):
    """Todas las cadenas hasta max_height con ids del alfabeto dado."""
    chains = [Chain.origin()]
    for height in range(1, max_height + 1):
        for combo in itertools.product(ids, repeat=height):
            chains.append(ChainBuilder.from_ids(combo))
    return chains

CHAINS = all_chains()

def test_origin_equals_only_origin():
    print(">> Ejecutando: test_origin_equals_only_origin...")
    
    assert ChainEquality.equal(Chain.origin(), Chain())
    assert not ChainEquality.equal(Chain.origin(), Chain.origin().extend(0))
    assert not ChainEquality.equal(Chain.origin().extend(0), Chain.origin())
    print("[SUCCESS] El Origen solo es igual al Origen.\n")

def test_rebuilt_chains_are_equal():
    a = ChainBuilder.from_ids([4, 5, 6])
    b = ChainBuilder.from_ids([4, 5, 6])
    assert a is not b
    assert ChainEquality.equal(a, b)

def test_different_heights_never_equal():
    short = ChainBuilder.from_ids([1, 2])
    long = ChainBuilder.from_ids([1, 2, 3])
    assert not ChainEquality.equal(short, long)
    assert not ChainEquality.equal(long, short)

def test_same_height_different_id_deep_in_history():
    a = ChainBuilder.from_ids([1, 2, 3, 4])
    b = ChainBuilder.from_ids([9, 2, 3, 4])
    assert not ChainEquality.equal(a, b)

def test_reflexive_and_symmetric():
    print(">> Ejecutando: test_reflexive_and_symmetric...")
    
    for a in CHAINS:
        assert ChainEquality.equal(a, a)
        for b in CHAINS:
            assert ChainEquality.equal(a, b) == ChainEquality.equal(b, a)
    print("[SUCCESS] Reflexiva y simétrica.\n")

def test_transitive():
    # Copias independientes para no depender de la identidad de objetos
    copies = [ChainBuilder.from_ids(c.block_ids()) for c in CHAINS]
    for a, b, c in itertools.product(CHAINS, copies, CHAINS):
        if ChainEquality.equal(a, b) and ChainEquality.equal(b, c):
            assert ChainEquality.equal(a, c)

def test_equal_implies_same_height():
    print(">> Ejecutando: test_equal_implies_same_height...")
    
    for a, b in itertools.product(CHAINS, repeat=2):
        proof = ChainEquality.prove(a, b)
        if proof is not None:
            assert a.height == b.height
            assert ChainEquality.same_height(proof) == a.height == proof.height
        else:
            assert not ChainEquality.equal(a, b)
    print("[SUCCESS] Igualdad implica misma altura.\n")

def test_proof_flipped():
    a = ChainBuilder.from_ids([1, 2])
    b = ChainBuilder.from_ids([1, 2])
    proof = ChainEquality.prove(a, b)
    assert proof is not None
    flipped = proof.flipped()
    assert flipped.left is b and flipped.right is a

def test_same_height_rejects_forged_proof():
    forged = EqualityProof(left=Chain.origin(), right=Chain.origin().extend(1))
    with pytest.raises(ValueError):
        ChainEquality.same_height(forged)
