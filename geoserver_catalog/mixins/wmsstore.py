from ..resources import WmsStore
from ..resources.resource import name_of

class WMSStoreMixin(object):
    def get_wms_stores(self,workspace=None):
        """
        Return the wmsstores of the workspace; or the wmsstores of all workspaces if workspace is None
        """
        workspaces = self.get_workspaces() if workspace is None else [self.get_workspace(name_of(workspace))]
        return [store for w in workspaces for store in w.wms_stores]

    def get_wms_store(self,workspace,name):
        workspace = name_of(workspace)
        return self._search_member(WmsStore,name,{"workspace":workspace},workspaces=workspace,wmsstores=name)
