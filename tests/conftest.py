import pytest

from plotclock import ForwardKinematics, InverseKinematics, LinkageConfig


@pytest.fixture(scope='session')
def config():
    return LinkageConfig.from_config()


@pytest.fixture(scope='session')
def forward(config):
    return ForwardKinematics(config)


@pytest.fixture(scope='session')
def inverse(config):
    return InverseKinematics(config)
