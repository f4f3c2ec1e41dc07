class Frame(object):
    __slots__ = ('name', 'variable', 'dynamic')

    def __init__(self, name, variable):
        self.name = name
        self.variable = variable
        self.dynamic = False

    def __repr__(self):
        return '<Frame {}={!r}{}>'.format(self.variable, self.name,
                                          ' dynamic' if self.dynamic else '')


class NamespaceStack(object):
    """Translators bound along the current path of nested scopes.

    Scopes are not represented explicitly: a visitor remembers the depth on
    entering a node and unwinds back to it when the node's scope ends.
    """

    def __init__(self):
        self._frames = []

    def __len__(self):
        return len(self._frames)

    def __iter__(self):
        return iter(self._frames)

    def push(self, name, variable):
        frame = Frame(name, variable)
        self._frames.append(frame)
        return frame

    def lookup(self, variable):
        for frame in reversed(self._frames):
            if frame.variable == variable:
                return frame
        return None

    def current(self):
        return self._frames[-1] if self._frames else None

    def mark_dynamic(self, name):
        for frame in self._frames:
            if frame.name == name:
                frame.dynamic = True

    def unwind(self, depth):
        """Pops frames pushed above ``depth`` and returns them"""
        count = len(self._frames) - depth
        if count <= 0:
            return []
        popped = self._frames[-count:]
        del self._frames[-count:]
        return popped
