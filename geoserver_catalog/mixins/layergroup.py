from ..resources import LayerGroup
from ..resources.resource import name_of

class LayergroupMixin(object):
    def get_layergroups(self,workspace=None):
        """
        Return the global layergroups if workspace is None; otherwise return the layergroups of the workspace
        """
        workspace = name_of(workspace)
        if workspace:
            names = self._search_names(LayerGroup,workspaces=workspace,layergroups=None)
        else:
            names = self._search_names(LayerGroup,layergroups=None)
        return self.list(LayerGroup,names,{"workspace":workspace})

    def get_layergroup(self,name,workspace=None):
        workspace = name_of(workspace)
        if workspace:
            return self._search_member(LayerGroup,name,{"workspace":workspace},workspaces=workspace,layergroups=name)
        else:
            return self._search_member(LayerGroup,name,layergroups=name)
