import unittest

from table_excel.columns.models import HeaderColumn, to_header_columns
from table_excel.columns.tree import ColumnTree, annotate_tree, get_leaf_columns, get_max_level


def _sample_columns():
    return to_header_columns([
        {'title': 'Name', 'dataIndex': 'name'},
        {'title': 'Info', 'children': [
            {'title': 'Age', 'dataIndex': 'age', 'required': True},
            {'title': 'Address', 'children': [
                {'title': 'City', 'dataIndex': 'city'},
                {'title': 'Street', 'dataIndex': 'street'},
            ]},
        ]},
        {'title': 'Note', 'dataIndex': 'note', 'children': []},
    ])


class TestHeaderColumn(unittest.TestCase):

    def test_camel_case_keys_are_accepted(self):
        handler = lambda value: value
        check = lambda value: True
        column = HeaderColumn.model_validate({
            'title': 'Age',
            'dataIndex': 'age',
            'importHandler': handler,
            'validate': check,
            'message': ' must be a number',
        })
        self.assertEqual(column.data_index, 'age')
        self.assertIs(column.import_handler, handler)
        self.assertIs(column.validate_value, check)
        self.assertEqual(column.message, ' must be a number')
        self.assertFalse(column.required)

    def test_snake_case_names_are_accepted(self):
        column = HeaderColumn(title='Age', data_index='age')
        self.assertEqual(column.data_index, 'age')

    def test_loose_width_and_path_data_index(self):
        column = HeaderColumn.model_validate({'title': 'Name', 'dataIndex': ['user', 'name'], 'width': '20%'})
        self.assertEqual(column.data_index, ('user', 'name'))
        self.assertEqual(column.width, '20%')

    def test_empty_children_is_a_leaf(self):
        self.assertTrue(HeaderColumn(title='A').is_leaf)
        self.assertTrue(HeaderColumn(title='A', children=[]).is_leaf)
        self.assertFalse(HeaderColumn(title='A', children=[HeaderColumn(title='B')]).is_leaf)

    def test_to_header_columns_keeps_existing_models(self):
        column = HeaderColumn(title='Name')
        self.assertIs(to_header_columns([column])[0], column)


class TestColumnTree(unittest.TestCase):

    def setUp(self):
        self.columns = _sample_columns()
        self.name, self.info, self.note = self.columns
        self.age, self.address = self.info.children
        self.city, self.street = self.address.children

    def test_leaves_in_document_order(self):
        tree = annotate_tree(self.columns)
        self.assertEqual([c.title for c in tree.leaves], ['Name', 'Age', 'City', 'Street', 'Note'])

    def test_parent_links(self):
        tree = annotate_tree(self.columns)
        self.assertIsNone(tree.parent_of(self.name))
        self.assertIsNone(tree.parent_of(self.info))
        self.assertIs(tree.parent_of(self.age), self.info)
        self.assertIs(tree.parent_of(self.address), self.info)
        self.assertIs(tree.parent_of(self.city), self.address)
        self.assertIs(tree.parent_of(self.street), self.address)

    def test_annotating_twice_gives_same_result(self):
        first = ColumnTree(self.columns)
        second = ColumnTree(self.columns)

        self.assertEqual([id(c) for c in first.leaves], [id(c) for c in second.leaves])
        for node in [self.name, self.info, self.age, self.address, self.city, self.street, self.note]:
            self.assertIs(first.parent_of(node), second.parent_of(node))

    def test_caller_columns_are_not_modified(self):
        before = [c.model_dump() for c in self.columns]
        annotate_tree(self.columns)
        self.assertEqual([c.model_dump() for c in self.columns], before)

    def test_get_leaf_columns(self):
        leaves = get_leaf_columns(self.columns)
        self.assertEqual([c.data_index for c in leaves], ['name', 'age', 'city', 'street', 'note'])

    def test_max_level(self):
        self.assertEqual(get_max_level(self.columns), 3)
        self.assertEqual(ColumnTree(self.columns).max_depth, 3)
        self.assertEqual(get_max_level([HeaderColumn(title='A')]), 1)
        self.assertEqual(get_max_level([]), 1)


if __name__ == '__main__':
    unittest.main()
