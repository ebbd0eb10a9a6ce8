import graphdecl as g


@g.interface_type()
class Person(object):
    name = g.field(g.String)


@g.object_type()
class Author(Person):
    recipe_titles = g.field(g.ListType(g.String))

    def __init__(self, name, recipe_titles):
        self.name = name
        self.recipe_titles = recipe_titles


@g.resolver()
class AuthorResolver(object):
    @g.query(g.ListType(Person))
    def people(self):
        return [Author("Mary Berry", ["Apple pie"])]

    @g.query(g.ListType(Author))
    def authors(self):
        return [Author("Mary Berry", ["Apple pie"])]
