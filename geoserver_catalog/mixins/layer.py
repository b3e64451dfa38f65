from ..resources import Layer
from ..resources.resource import name_of

class LayerMixin(object):
    def each_layer(self,workspace=None):
        """
        Iterate the layers, only the layers in workspace if workspace is not None
        """
        workspace = name_of(workspace)
        for layer in self.list(Layer,self._search_names(Layer,layers=None)):
            if workspace and layer.workspace_name != workspace:
                continue
            yield layer

    def get_layers(self,workspace=None):
        return list(self.each_layer(workspace=workspace))

    def get_layer(self,name):
        return self._search_member(Layer,name,layers=name)
