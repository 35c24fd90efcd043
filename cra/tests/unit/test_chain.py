# cra/tests/unit/test_chain.py
'''
Test Suite para el Modelo Chain:
    Verifica la construcción inmutable de cadenas, el invariante de altura
    y el empaquetado AnyChain.
'''

import sys
import os
import copy
import pickle
import unittest

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from cra.core.models.chain import AnyChain, Chain, extend, origin
from cra.core.interfaces.i_chain import IChain
from cra.core.services.prefix_finder import PrefixFinder

class TestChainModel(unittest.TestCase):

    def test_origin_is_unique_root(self):
        print(">> Ejecutando: test_origin_is_unique_root...")
        
        root = origin()
        self.assertIs(root, Chain.origin())
        self.assertEqual(root.height, 0)
        self.assertTrue(root.is_origin)
        self.assertIsNone(root.previous)
        self.assertIsNone(root.tip)
        self.assertEqual(root.block_ids(), ())
        self.assertIsInstance(root, IChain)

        print("[SUCCESS] Origen único de altura 0.")

    def test_extend_tracks_height_and_shares_predecessor(self):
        print(">> Ejecutando: test_extend_tracks_height_and_shares_predecessor...")
        
        base = extend(origin(), 1)
        left = base.extend(2)
        right = base.extend(3)

        self.assertEqual(base.height, 1)
        self.assertEqual(left.height, 2)
        self.assertEqual(right.height, 2)

        # Fork: ambas ramas comparten el mismo objeto predecesor
        self.assertIs(left.previous, base)
        self.assertIs(right.previous, base)
        self.assertEqual(left.tip, 2)
        self.assertEqual(left.block_ids(), (1, 2))
        self.assertEqual(base.block_ids(), (1,))

        print("[SUCCESS] Altura derivada y prefijo compartido.")

    def test_block_id_validation(self):
        print(">> Ejecutando: test_block_id_validation...")
        
        root = origin()
        with self.assertRaises(ValueError):
            root.extend(-1)
        with self.assertRaises(ValueError):
            root.extend("7")  # type: ignore
        with self.assertRaises(ValueError):
            root.extend(True)  # type: ignore

        # Cero y enteros grandes son válidos
        self.assertEqual(root.extend(0).tip, 0)
        self.assertEqual(root.extend(2**80).tip, 2**80)

        print("[SUCCESS] Ids inválidos rechazados.")

    def test_malformed_link_is_rejected(self):
        print(">> Ejecutando: test_malformed_link_is_rejected...")
        
        with self.assertRaises(ValueError):
            Chain(previous=origin())
        with self.assertRaises(ValueError):
            Chain(block_id=5)
        with self.assertRaises(ValueError):
            Chain(previous="no-chain", block_id=5)  # type: ignore

        print("[SUCCESS] Enlaces incompletos rechazados.")

    def test_chain_is_immutable(self):
        print(">> Ejecutando: test_chain_is_immutable...")
        
        chain = origin().extend(1)
        with self.assertRaises(AttributeError):
            chain._height = 5  # type: ignore
        with self.assertRaises(AttributeError):
            chain.height = 5  # type: ignore
        with self.assertRaises(AttributeError):
            del chain._block_id

        # Copiar devuelve el mismo valor
        self.assertIs(copy.copy(chain), chain)
        self.assertIs(copy.deepcopy(chain), chain)
        self.assertEqual(chain.height, 1)

        print("[SUCCESS] Cadena inmutable.")

    def test_ancestor_at(self):
        print(">> Ejecutando: test_ancestor_at...")
        
        a1 = origin().extend(1)
        a2 = a1.extend(2)
        a3 = a2.extend(3)

        self.assertIs(a3.ancestor_at(3), a3)
        self.assertIs(a3.ancestor_at(1), a1)
        self.assertTrue(a3.ancestor_at(0).is_origin)

        with self.assertRaises(ValueError):
            a3.ancestor_at(4)
        with self.assertRaises(ValueError):
            a3.ancestor_at(-1)

        print("[SUCCESS] Ancestros por altura.")

    def test_equal_chains_share_hash(self):
        print(">> Ejecutando: test_equal_chains_share_hash...")
        
        a = origin().extend(1).extend(2)
        b = origin().extend(1).extend(2)
        c = origin().extend(2).extend(1)

        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(a, c)
        self.assertEqual(len({a, b, c}), 2)
        self.assertEqual(Chain(), origin())
        self.assertNotEqual(a, "not a chain")

        print("[SUCCESS] Hash consistente con la igualdad.")

    def test_deep_chain_walks_iteratively(self):
        print(">> Ejecutando: test_deep_chain_walks_iteratively...")
        
        # Más profundo que el límite de recursión por defecto
        depth = sys.getrecursionlimit() * 3
        chain = origin()
        for i in range(depth):
            chain = chain.extend(i)

        self.assertEqual(chain.height, depth)
        self.assertEqual(len(chain.block_ids()), depth)
        self.assertEqual(chain.ancestor_at(0), origin())

        print("[SUCCESS] Recorridos iterativos en cadenas profundas.")

    def test_ancestor_at_rejects_non_int_height(self):
        chain = origin().extend(1).extend(2)
        with self.assertRaises(ValueError):
            chain.ancestor_at(1.5)  # type: ignore
        with self.assertRaises(ValueError):
            chain.ancestor_at(True)  # type: ignore

    def test_pickle_round_trip(self):
        print(">> Ejecutando: test_pickle_round_trip...")
        
        chain = origin().extend(3).extend(1).extend(4)
        restored = pickle.loads(pickle.dumps(chain))

        self.assertEqual(restored, chain)
        self.assertEqual(restored.height, 3)
        self.assertIs(pickle.loads(pickle.dumps(origin())), origin())

        wrapped = pickle.loads(pickle.dumps(AnyChain.wrap(chain)))
        self.assertEqual(wrapped.height, 3)
        self.assertEqual(wrapped.chain, chain)

        witness = PrefixFinder.find_prefix(origin().extend(3), chain)
        restored_witness = pickle.loads(pickle.dumps(witness))
        self.assertEqual(restored_witness.links, (1, 4))
        self.assertTrue(restored_witness.verify())

        print("[SUCCESS] Cadenas serializables con pickle.")

    def test_repr(self):
        self.assertEqual(repr(origin()), "Chain(origin)")
        self.assertEqual(repr(origin().extend(4)), "Chain(height=1, tip=4)")

class TestAnyChain(unittest.TestCase):

    def test_wrap_and_declared_height(self):
        print(">> Ejecutando: test_wrap_and_declared_height...")
        
        chain = origin().extend(1).extend(2)
        wrapped = AnyChain.wrap(chain)

        self.assertEqual(wrapped.height, 2)
        self.assertIs(wrapped.chain, chain)
        self.assertEqual(AnyChain(height=2, chain=chain), wrapped)

        with self.assertRaises(ValueError):
            AnyChain(height=3, chain=chain)
        with self.assertRaises(ValueError):
            AnyChain(height=0, chain=None)  # type: ignore

        print("[SUCCESS] AnyChain valida la altura declarada.")

    def test_heterogeneous_collection(self):
        chains = [AnyChain.wrap(origin()), AnyChain.wrap(origin().extend(9)), AnyChain.wrap(origin().extend(1).extend(2))]
        self.assertEqual([c.height for c in chains], [0, 1, 2])

if __name__ == "__main__":
    unittest.main()
