from teamhub.schemas.base import ApiResponse
from teamhub.schemas.user import User, UserRegister, UserLogin, RefreshRequest, RegisteredUser, LoggedInUser, TokenPair, GitToken
from teamhub.schemas.team import Team, TeamCreate, TeamUpdate, MemberAdd, MemberRemove
from teamhub.schemas.project import Project, ProjectCreate, RepoLink, Task, TaskCreate, ProjectWithTask
from teamhub.schemas.todo import Todo, TodoCreate, TodoUpdate
