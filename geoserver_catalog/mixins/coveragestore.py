from ..resources import CoverageStore,Coverage
from ..resources.resource import name_of

class CoverageStoreMixin(object):
    def get_coverage_stores(self,workspace=None):
        """
        Return the coveragestores of the workspace; or the coveragestores of all workspaces if workspace is None
        """
        workspaces = self.get_workspaces() if workspace is None else [self.get_workspace(name_of(workspace))]
        return [store for w in workspaces for store in w.coverage_stores]

    def get_coverage_store(self,workspace,name):
        workspace = name_of(workspace)
        return self._search_member(CoverageStore,name,{"workspace":workspace},workspaces=workspace,coveragestores=name)


class CoverageMixin(object):
    def get_coverages(self,workspace,coveragestore):
        workspace = name_of(workspace)
        coveragestore = name_of(coveragestore)
        names = self._search_names(Coverage,workspaces=workspace,coveragestores=coveragestore,coverages=None)
        return self.list(Coverage,names,{"workspace":workspace,"coverage_store":coveragestore})

    def get_coverage(self,workspace,coveragestore,name):
        workspace = name_of(workspace)
        coveragestore = name_of(coveragestore)
        return self._search_member(Coverage,name,{"workspace":workspace,"coverage_store":coveragestore},workspaces=workspace,coveragestores=coveragestore,coverages=name)
