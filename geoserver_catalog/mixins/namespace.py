import logging

from ..resources import Namespace

logger = logging.getLogger(__name__)

class NamespaceMixin(object):
    def get_namespaces(self):
        return self.list(Namespace,self._search_names(Namespace,namespaces=None))

    def get_namespace(self,prefix):
        return self._search_member(Namespace,prefix,namespaces=prefix)

    def get_default_namespace(self):
        """
        Return the default namespace, identified by its own prefix
        """
        default = self._search_member(Namespace,"default",namespaces="default")
        namespace = Namespace(self,name=default.name)
        namespace._set_dom(default.dom)
        return namespace

    def set_default_namespace(self,prefix,uri=None):
        if not isinstance(prefix,str):
            raise TypeError("Namespace prefix must be a string")
        namespace = Namespace(self,name="default")
        namespace.name = prefix
        namespace.uri = uri
        namespace.isolated = None
        namespace.save()
        logger.debug("Succeed to set the default namespace to {}".format(prefix))
        return namespace
