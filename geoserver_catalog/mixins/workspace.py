import logging

from ..resources import Workspace

logger = logging.getLogger(__name__)

class WorkspaceMixin(object):
    def get_workspaces(self):
        """
        Return the list of workspaces
        """
        return self.list(Workspace,self._search_names(Workspace,workspaces=None))

    def get_workspace(self,name):
        """
        Return the workspace; raise ObjectNotFound if not found
        """
        return self._search_member(Workspace,name,workspaces=name)

    def get_default_workspace(self):
        return self.get_workspace("default")

    def set_default_workspace(self,workspace):
        """
        Assign the default workspace; the workspace is created if it doesn't exist
        """
        if not isinstance(workspace,str):
            raise TypeError("Workspace name must be a string")
        dws = Workspace(self,name="default")
        dws.name = workspace
        dws.isolated = None
        dws.save()
        logger.debug("Succeed to set the default workspace to {}".format(workspace))
        return dws

    def create_workspace(self,name):
        """
        Create the workspace if it doesn't exist
        Return the workspace
        """
        workspace = Workspace(self,name=name)
        if workspace.new:
            workspace.save()
        return workspace
