import unittest
from fractions import Fraction
from forth import DataStack, StackUnderflow, format_number


class TestDataStack(unittest.TestCase):
    def setUp(self):
        self.stack = DataStack()

    def test_push_pop_is_lifo(self):
        for n in (1, 2, 3):
            self.stack.push(n)
        self.assertEqual([self.stack.pop() for _ in range(3)], [3, 2, 1])
        self.assertEqual(len(self.stack), 0)

    def test_pop_empty_raises(self):
        with self.assertRaises(StackUnderflow):
            self.stack.pop()
        self.assertEqual(len(self.stack), 0)
        self.stack.push(9)
        self.assertEqual(self.stack.pop(), 9)

    def test_underflow_description(self):
        with self.assertRaises(StackUnderflow) as cm:
            self.stack.pop()
        self.assertEqual(cm.exception.description, 'Stack underflow')

    def test_peek_and_need(self):
        self.stack.push(1)
        self.stack.push(2)
        self.assertEqual(self.stack.peek(), 2)
        self.assertEqual(self.stack.peek(1), 1)
        with self.assertRaises(StackUnderflow):
            self.stack.peek(2)
        with self.assertRaises(StackUnderflow):
            self.stack.need(3)
        self.assertEqual(list(self.stack), [1, 2])

    def test_render(self):
        self.assertEqual(self.stack.render(), '<0> ')
        for n in (1, 2, 3):
            self.stack.push(n)
        self.assertEqual(self.stack.render(), '<3> 1 2 3 ')
        self.assertEqual(len(self.stack), 3)

    def test_render_fraction(self):
        self.stack.push(Fraction(1, 3))
        self.stack.push(-2)
        self.assertEqual(self.stack.render(), '<2> 1/3 -2 ')

    def test_format_number(self):
        self.assertEqual(format_number(5), '5')
        self.assertEqual(format_number(Fraction(-3, 2)), '-3/2')
        self.assertEqual(format_number(Fraction(4, 2)), '2')


if __name__ == '__main__':
    unittest.main()
