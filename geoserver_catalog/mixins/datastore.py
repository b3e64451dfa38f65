from ..resources import DataStore,FeatureType
from ..resources.resource import name_of

class DatastoreMixin(object):
    def get_data_stores(self,workspace=None):
        """
        Return the datastores of the workspace; or the datastores of all workspaces if workspace is None
        """
        workspaces = self.get_workspaces() if workspace is None else [self.get_workspace(name_of(workspace))]
        return [store for w in workspaces for store in w.data_stores]

    def get_data_store(self,workspace,name):
        workspace = name_of(workspace)
        return self._search_member(DataStore,name,{"workspace":workspace},workspaces=workspace,datastores=name)


class FeaturetypeMixin(object):
    def get_feature_types(self,workspace,datastore):
        workspace = name_of(workspace)
        datastore = name_of(datastore)
        names = self._search_names(FeatureType,workspaces=workspace,datastores=datastore,featuretypes=None)
        return self.list(FeatureType,names,{"workspace":workspace,"data_store":datastore})

    def get_feature_type(self,workspace,datastore,name):
        workspace = name_of(workspace)
        datastore = name_of(datastore)
        return self._search_member(FeatureType,name,{"workspace":workspace,"data_store":datastore},workspaces=workspace,datastores=datastore,featuretypes=name)
