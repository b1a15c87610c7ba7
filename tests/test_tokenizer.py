import unittest
from collections import deque
from mathexpr.frontend.errors import ExprSyntaxError
from mathexpr.frontend.utils import *

class TestTokenize(unittest.TestCase):
    def test_operators(self):
        toks = tokenize('1+2-3*4/5^6')
        self.assertEqual([t.token_id for t in toks], [
            TokenId.NUMBER, TokenId.OP_PLUS, TokenId.NUMBER, TokenId.OP_MINUS,
            TokenId.NUMBER, TokenId.OP_MUL, TokenId.NUMBER, TokenId.OP_DIV,
            TokenId.NUMBER, TokenId.OP_POW, TokenId.NUMBER])

    def test_whitespace_skipped(self):
        toks = tokenize('  12 \t+\n( 3 )  ')
        self.assertEqual([t.value for t in toks], ['12', '+', '(', '3', ')'])

    def test_positions(self):
        toks = tokenize('10 * (2)')
        self.assertEqual([t.pos for t in toks], [0, 3, 5, 6, 7])

    def test_multi_digit_number(self):
        toks = tokenize('007 123456')
        self.assertEqual(toks, [Token(TokenId.NUMBER, '007', 0), Token(TokenId.NUMBER, '123456', 4)])

    def test_empty(self):
        self.assertEqual(tokenize(''), [])
        self.assertEqual(tokenize('   '), [])

    def test_unknown_character(self):
        with self.assertRaises(ExprSyntaxError) as cm:
            tokenize('2 $ 3')
        self.assertEqual(cm.exception.pos, 2)
        self.assertIn("'$'", str(cm.exception))

    def test_letters_rejected(self):
        with self.assertRaises(ExprSyntaxError):
            tokenize('x + 1')

class TestMatch(unittest.TestCase):
    def test_match_pops(self):
        toks = deque(tokenize('( 1'))
        tok = match(toks, TokenId.RBRACE_LEFT)
        self.assertEqual(tok.value, '(')
        self.assertEqual(look(toks), TokenId.NUMBER)

    def test_match_one_of(self):
        toks = deque(tokenize('-'))
        self.assertEqual(match(toks, [TokenId.OP_PLUS, TokenId.OP_MINUS]).value, '-')
        self.assertEqual(list(toks), [])

    def test_match_wrong_token(self):
        toks = deque(tokenize('1 )'))
        match(toks, TokenId.NUMBER)
        with self.assertRaises(ExprSyntaxError) as cm:
            match(toks, TokenId.NUMBER)
        self.assertEqual(cm.exception.pos, 2)

    def test_match_end_of_input(self):
        with self.assertRaises(ExprSyntaxError) as cm:
            match(deque(), TokenId.NUMBER, end=5)
        self.assertEqual(cm.exception.pos, 5)
        self.assertIn('end of input', str(cm.exception))

    def test_look(self):
        toks = tokenize('1 +')
        self.assertEqual(look(toks), TokenId.NUMBER)
        self.assertEqual(look(toks, 1), TokenId.OP_PLUS)
        self.assertIsNone(look(toks, 2))

if __name__ == '__main__':
    unittest.main()
