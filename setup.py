# Copyright 2026, Pulumi Corporation.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Pulumi dynamic resource for Azure Policy remediations."""

from setuptools import find_packages, setup

VERSION = "0.1.0"


def readme():
    try:
        with open('README.md', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        return "Pulumi Policy Insights remediations - Development Version"


setup(name='pulumi-policyinsights',
      version=VERSION,
      description='Pulumi dynamic resource for Azure Policy remediations',
      long_description=readme(),
      long_description_content_type='text/markdown',
      url='https://github.com/pulumi/pulumi',
      license='Apache 2.0',
      packages=find_packages(exclude=("test*",)),
      package_data={
          'pulumi_policyinsights': [
              'py.typed'
          ]
      },
      python_requires='>=3.9',
      install_requires=[
          'pulumi>=3.140.0,<4.0.0',
          'azure-core>=1.29',
          'azure-identity>=1.15',
          'azure-mgmt-core>=1.4',
          'azure-mgmt-policyinsights>=1.1.0b1',
      ],
      extras_require={
          'test': [
              'pytest',
          ],
      },
      zip_safe=False)
