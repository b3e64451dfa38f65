from ..resources import Style
from ..resources.resource import name_of

class StyleMixin(object):
    def get_styles(self,workspace=None):
        """
        Return the global styles if workspace is None; otherwise return the styles of the workspace
        """
        workspace = name_of(workspace)
        if workspace:
            names = self._search_names(Style,workspaces=workspace,styles=None)
        else:
            names = self._search_names(Style,styles=None)
        return self.list(Style,names,{"workspace":workspace})

    def get_style(self,name,workspace=None):
        workspace = name_of(workspace)
        if workspace:
            return self._search_member(Style,name,{"workspace":workspace},workspaces=workspace,styles=name)
        else:
            return self._search_member(Style,name,styles=name)
