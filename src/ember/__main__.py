from ember.cli.cmd import cli

if __name__ == "__main__":
	cli()
