import io
import errno
import os.path


class SourceNotFound(LookupError):
    pass


class Source(object):

    def __init__(self, path, content):
        self.path = path
        self.content = content


class LoaderBase(object):

    def load(self, path):
        raise NotImplementedError


class DictLoader(LoaderBase):

    def __init__(self, mapping):
        self._sources = mapping

    def load(self, path):
        try:
            return Source(path, self._sources[path])
        except KeyError:
            raise SourceNotFound(path)


class FileSystemLoader(LoaderBase):
    _encoding = 'utf-8'

    def __init__(self, base=None):
        self._base = base

    def load(self, path):
        file_path = path if self._base is None \
            else os.path.join(self._base, path)
        try:
            with io.open(file_path, encoding=self._encoding) as f:
                content = f.read()
        except IOError as e:
            if e.errno not in (errno.ENOENT, errno.EISDIR, errno.EINVAL):
                raise
            raise SourceNotFound(path)
        return Source(path, content)
